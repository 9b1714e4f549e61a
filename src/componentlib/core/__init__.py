"""Core building blocks shared by the theme engine."""
