"""Dialog modules for user interaction.

This package contains all dialog windows used by the application:
- information - Modal information message with a single button
- PreferencesDialog - Settings and preferences management
- ErrorDialog - Error reporting with stack traces
- AboutDialog - Application information and version
"""
# Author: Rich Lewis - GitHub: @RichLewis007

__all__ = ["about", "error_dialog", "information", "preferences"]
