"""Core Django app: the MQL4 Knowledge Hub page."""
