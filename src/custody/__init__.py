"""Custody bounded context — bottle provenance from manufacture to sale."""
