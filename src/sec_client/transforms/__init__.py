"""Arrow tables for the SEC datasets.

Each dataset package holds a ``main.py`` with the pyarrow ``SCHEMA`` and a
``transform`` that builds the table, and a ``test.py`` validator that every
produced table goes through.
"""
