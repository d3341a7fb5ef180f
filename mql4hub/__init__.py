"""Django project package for the MQL4 Knowledge Hub."""
