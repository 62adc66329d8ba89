"""
MCP Server Instructions - usage guide for AI agents.
"""

from __future__ import annotations

SERVER_INSTRUCTIONS = """
World Bank Documents & Reports MCP Server

Search the World Bank's public Documents & Reports collection (project
documents, procurement plans, working papers, evaluations, ...).

## Recommended flow
1. Unsure which filter values exist? Call wb_list_countries,
   wb_list_document_types, or wb_list_facets (e.g. facets=["lang_exact"]).
2. Search with wb_search_documents using the exact values from step 1:
   wb_search_documents(country="Mexico", document_type="Procurement Plan", limit=20)
3. Open one hit with wb_get_document(document_id="...", fields=["abstracts", "pdfurl"]).

## Notes
- country / document_type / theme / sector / language are EXACT matches.
- Dates are YYYY-MM-DD strings (start_date, end_date).
- limit is 1-100 (default 20); page with offset.
- Requests are spaced at least 300 ms apart; errors are not retried.
"""
