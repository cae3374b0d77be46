"""
Data-source adapters that provide tables to the schema builders.
"""
