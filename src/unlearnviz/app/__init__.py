"""
Run with: python -m unlearnviz
"""
