"""Bank customer profile API: users with their account, card, features and news."""
