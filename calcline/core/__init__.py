"""
Core modules for calcline.

- domain: expression alphabet, tokens, calculator state
- math: numerical safeguards and number formatting
"""
