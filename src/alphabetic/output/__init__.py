"""Result formatting for CLI output."""
