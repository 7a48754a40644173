"""
Core package providing the delegation object model and class derivation.

Architecture:
- base: method tables with a single delegation parent
- validations: shape check and normalization of extend's arguments
- classes: class records and their instances
- builder: the extend operation and the root classes
"""
