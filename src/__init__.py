# Deribit Trading Client - Source Package
"""
This package contains all modules for the Deribit manual trading client:
client-credentials authentication, order placement, cancellation and
modification, order-book lookup and position listing.
"""
