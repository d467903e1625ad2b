"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(settings, pagination, response envelopes). Keep feature-specific lookup and
filter logic in the corresponding feature package (e.g. `locations/`).
"""
