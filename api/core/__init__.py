"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that any resource uses
(DB wiring, settings, logging, error envelopes, middleware). Keep
resource-specific SQL and business logic in the corresponding package
(e.g. `products/`).
"""
