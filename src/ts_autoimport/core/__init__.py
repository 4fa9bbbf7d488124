"""
Core Package.

Contains the planning logic:
- Document snapshot
- Edit plan variants and their application
- Import Fixer and its mixins
"""
