### Description ###
# OrderDesk - Local-first Order Intake
# - Package Root -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
OrderDesk Package

Local data layer for a small apparel order-intake tool: product models,
customer orders stored per tenant, CSV export and best-effort sync of
orders to a Google Sheets webhook.
"""

__version__ = "1.0.0"
