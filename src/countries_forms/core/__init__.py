"""Core services: country data, list binding, settings, paths and logging."""
# Author: Rich Lewis - GitHub: @RichLewis007
