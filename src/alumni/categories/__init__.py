"""Department categories.

- table: the compiled-in category -> department mapping
- apply: filtering + year ordering of records for a selected category
"""
