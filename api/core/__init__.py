"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that both features use
(DB wiring, schema bootstrap, error responses, logging). Keep feature-specific
SQL and HTTP mapping in the corresponding feature package (e.g. `fish/`).
"""
