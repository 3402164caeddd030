"""Steam library summaries ranked by playtime, enriched with RAWG genres."""
