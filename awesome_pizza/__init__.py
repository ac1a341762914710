"""
                Awesome Pizza Orders

A small order-taking service for a single daily menu: menu listing,
order creation, lookup by id and status updates over an in-memory store.

Author: Khalil Bannouri
Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__author__ = "Khalil Bannouri"
