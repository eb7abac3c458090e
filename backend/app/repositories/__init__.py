"""
Repositories package: data-access layer.

One module per stored entity.  Repository functions take the
`AsyncSession` as their first argument, flush but never commit (the
`get_db` dependency owns the transaction), and know nothing about HTTP.
"""
