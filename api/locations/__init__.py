"""
Thai administrative locations: geographies, provinces, districts and
sub-districts, served from an in-memory snapshot of static JSON files.
"""
