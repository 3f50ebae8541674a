"""
Quote Configurator Package

Rule evaluation and price estimation for the product configurator wizard.
Decides which questions a visitor sees and folds their answers into a
min/max price estimate with a breakdown.
"""

__version__ = "1.0.0"
