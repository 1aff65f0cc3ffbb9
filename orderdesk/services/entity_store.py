### Description ###
# OrderDesk - Local-first Order Intake
# - Entity Store -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Entity Store

Authoritative in-memory state for the active client: committed models, a
draft copy of the models for staged edits, and orders (newest first).

Every mutation writes the whole affected collection to the key-value store
before it returns. New orders are handed to the sync client afterwards; a
failed sync never undoes the local change.
"""

from orderdesk.config import DEFAULT_TENANT_NAME
from orderdesk.schemas.fields import coerce_qty, new_id, now_iso
from orderdesk.schemas.model import Model
from orderdesk.schemas.order import Order, OrderInput
from orderdesk.services.namespace import TENANT_NAME_KEY, namespace_key
from orderdesk.services.notifier import Notifier
from orderdesk.services.patcher import patch_models, patch_orders
from orderdesk.services.storage import KeyValueStore
from orderdesk.services.sync_client import SyncClient
from orderdesk.utils import get_logger

logger = get_logger(__name__)

MODELS = "models"
ORDERS = "orders"

# Models a brand-new client starts with
SEED_MODELS = [
    {"name": "Classic Tee — Black", "available": True, "image": ""},
    {"name": "Classic Tee — White", "available": True, "image": ""},
    {"name": "Pocket Tee — Navy", "available": False, "image": ""},
]


class OrderValidationError(ValueError):
    """Raised when a submitted order is missing a required field"""

    pass


class EntityStore:
    """
    Models and orders of the active client.

    Usage:
        store = EntityStore(KeyValueStore(session_factory), sync_client=client)
        store.switch_tenant("Bolos Crew")
        order = store.add_order(OrderInput(model_id=..., name="Jane"))
    """

    def __init__(
        self,
        storage: KeyValueStore,
        sync_client: SyncClient | None = None,
        notifier: Notifier | None = None,
        default_tenant: str = DEFAULT_TENANT_NAME,
    ):
        self.storage = storage
        self.sync_client = sync_client
        self.notifier = notifier
        self.tenant_name: str = default_tenant
        self.namespace: str = namespace_key(default_tenant)
        self.models: list[Model] = []
        self.draft_models: list[Model] = []
        self.orders: list[Order] = []

    # ---------- tenant / loading ----------

    def open(self) -> None:
        """Load the last used client (or the default one)"""
        stored = self.storage.get(None, TENANT_NAME_KEY)
        if isinstance(stored, str):
            self.tenant_name = stored
        self.load_namespace(namespace_key(self.tenant_name))

    def switch_tenant(self, name: str) -> None:
        """Make another client active; its data is loaded (or seeded) as-is"""
        self.tenant_name = name
        self.storage.set(None, TENANT_NAME_KEY, name)
        self.load_namespace(namespace_key(name))

    def load_namespace(self, key: str) -> None:
        """
        Replace in-memory state with the namespace's stored data.

        Missing models are seeded, stored records are patched, and the draft
        buffer is reset to the loaded models. The patched collections are
        written back so seeded ids stay stable across loads.
        """
        raw_models = self.storage.get(key, MODELS)
        if raw_models is None:
            raw_models = SEED_MODELS
        models = patch_models(raw_models)
        orders = patch_orders(self.storage.get(key, ORDERS, []), models, tenant=self.tenant_name)

        self.namespace = key
        self.models = models
        self.draft_models = list(models)
        self.orders = orders
        self._persist_models()
        self._persist_orders()

        logger.info(f"Loaded namespace '{key}': {len(models)} model(s), {len(orders)} order(s)")

    # ---------- models ----------

    def available_models(self) -> list[Model]:
        return [model for model in self.models if model.available]

    def find_model(self, model_id: str) -> Model | None:
        return next((model for model in self.models if model.id == model_id), None)

    def add_draft_model(self, name: str = "New Model") -> Model:
        """Stage a new model at the top of the draft list"""
        model = Model(id=new_id(), name=name, available=True, image="")
        self.draft_models.insert(0, model)
        return model

    def update_draft_model(
        self,
        model_id: str,
        *,
        name: str | None = None,
        available: bool | None = None,
        image: str | None = None,
    ) -> Model:
        """
        Stage changes to a draft model.

        Raises:
            KeyError: If no draft model has that id
        """
        changes = {
            key: value
            for key, value in {"name": name, "available": available, "image": image}.items()
            if value is not None
        }
        for index, model in enumerate(self.draft_models):
            if model.id == model_id:
                updated = model.model_copy(update=changes)
                self.draft_models[index] = updated
                return updated
        raise KeyError(model_id)

    def remove_draft_model(self, model_id: str) -> None:
        """
        Stage removal of a model.

        Raises:
            KeyError: If no draft model has that id
        """
        remaining = [model for model in self.draft_models if model.id != model_id]
        if len(remaining) == len(self.draft_models):
            raise KeyError(model_id)
        self.draft_models = remaining

    def reset_drafts(self) -> None:
        """Discard staged model edits"""
        self.draft_models = list(self.models)

    def save_models(self, buffer: list[Model] | None = None) -> list[Model]:
        """Commit the draft buffer (or the given list) as the client's models"""
        models = list(self.draft_models if buffer is None else buffer)
        self.models = models
        self.draft_models = list(models)
        self._persist_models()
        self._notify("Models saved.")
        return self.models

    # ---------- orders ----------

    def add_order(self, form: OrderInput) -> Order:
        """
        Record a new order and hand it to the sync client.

        Raises:
            OrderValidationError: If no known model is selected or the name is blank
        """
        model = self.find_model(form.model_id) if form.model_id else None
        if model is None:
            self._reject("Please select a model.")
        if not form.name.strip():
            self._reject("Please enter a name.")

        order = Order(
            id=new_id(),
            ts=now_iso(),
            client=self.tenant_name,
            model=model.name,
            model_image=model.image,
            size=form.size,
            qty=coerce_qty(form.qty),
            name=form.name,
            email=form.email,
            phone=form.phone,
            address=form.address,
            notes=form.notes,
            mockups=list(form.mockups),
        )
        self.orders.insert(0, order)
        self._persist_orders()
        logger.info(f"Order {order.id} saved: {order.qty} x {order.model} ({order.size})")
        self._notify("Order saved.")

        if self.sync_client is not None and self.sync_client.auto_sync and self.sync_client.is_configured:
            self.sync_client.dispatch_order(order)

        return order

    def delete_order(self, order_id: str) -> bool:
        """Remove an order; returns False (and changes nothing) if it does not exist"""
        remaining = [order for order in self.orders if order.id != order_id]
        if len(remaining) == len(self.orders):
            return False
        self.orders = remaining
        self._persist_orders()
        logger.info(f"Order {order_id} deleted")
        return True

    # ---------- helpers ----------

    def _persist_models(self) -> None:
        self.storage.set(self.namespace, MODELS, [model.model_dump() for model in self.models])

    def _persist_orders(self) -> None:
        self.storage.set(self.namespace, ORDERS, [order.to_record() for order in self.orders])

    def _reject(self, message: str) -> None:
        self._notify(message)
        raise OrderValidationError(message)

    def _notify(self, message: str) -> None:
        if self.notifier is not None:
            self.notifier.notify(message)
