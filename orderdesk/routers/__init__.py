### Description ###
# OrderDesk - Local-first Order Intake
# - API Routers Package -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
API Routers Package

Contains endpoint routers for different resources:
- tenant: Active client selection
- models: Product models and draft edits
- orders: Orders, CSV export and sync
- summary: Size breakdown and notifications
- settings: config.yaml editing
"""

from .models import router as models_router
from .orders import router as orders_router
from .settings import router as settings_router
from .summary import router as summary_router
from .tenant import router as tenant_router

__all__ = [
    "models_router",
    "orders_router",
    "settings_router",
    "summary_router",
    "tenant_router",
]
