"""Summary aggregation helpers.

This package turns the loaded record set into the three report aggregates:
distinct county count, `tiv_2012` total and the top counties ranked by their
year-over-year change in insured value.
"""
