"""
Capability strings reported by DataSource.supports() and Design.supports().

    ds = DataSource.from_file("prostate.csv")
    ds.supports(CAPABILITY_NAMED_COLUMNS)   # True: columns come from the header
"""

# Columns are held as in-memory numpy arrays
CAPABILITY_MATERIALIZED = 'materialized'

# Same data on every access, so a chosen subset can be refitted
CAPABILITY_REPEATABLE = 'repeatable'

# Columns are addressable by name (DataFrame, delimited file, or named arrays)
CAPABILITY_NAMED_COLUMNS = 'named_columns'

__all__ = [
    'CAPABILITY_MATERIALIZED',
    'CAPABILITY_REPEATABLE',
    'CAPABILITY_NAMED_COLUMNS',
]
