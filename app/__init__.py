"""
Product Scraper API - HTTP facade over an external product scraper.
"""

__version__ = "0.1.0"

NAME = "product-scraper-api"
DESCRIPTION = "HTTP API that forwards product search and detail lookups to a scraper backend."
AUTHORS = "Product Scraper API contributors"
REPOSITORY = "https://github.com/dvishal485/flipkart-scraper-api"
LICENSE = "GPL-3.0"
