"""
Property filtering engine for the brokerage site.

This package holds the listing catalog loader, the per-facet match rules,
the filter session that applies them across the catalog, the query-string
codec used by the cross-page search redirect, and the active-filter summaries.
"""
