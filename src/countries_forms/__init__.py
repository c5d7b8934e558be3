"""Countries Forms: a desktop form listing country data."""
# Author: Rich Lewis - GitHub: @RichLewis007
