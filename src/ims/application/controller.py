"""Inventory view controller.

Owns the application state and mediates every call to the product API.
Each mutation follows the same contract: on success the local cache is
replaced by a full reload, so afterwards it equals the server state. On
failure the cache and the user's draft are left as they were.

Errors never escape the controller. Every DomainException is caught at
the call site, logged and shown to the user through the blocking
``alert`` callback.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ims.application.add_product import AddProductHandler
from ims.application.dto import InventoryViewDTO
from ims.application.list_products import ListProductsHandler
from ims.application.notifications import Notification, Notifier
from ims.application.remove_product import RemoveProductHandler
from ims.application.state import AppState, InteractionMode, Theme
from ims.application.update_product import UpdateProductHandler
from ims.application.view import DEFAULT_SORT_KEY, build_view, toggle_sort_key
from ims.domain.exceptions import DomainException, EntityNotFoundError
from ims.domain.model.draft import ProductDraft
from ims.domain.model.product import Product
from ims.domain.repository.preference_store import SORT_KEY, THEME_KEY, PreferenceStore
from ims.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

Alert = Callable[[str], None]
Confirm = Callable[[str], bool]

DELETE_CONFIRMATION = "Delete this product? This cannot be undone."


class InventoryController:

    def __init__(
        self,
        product_repo: ProductRepository,
        preferences: PreferenceStore,
        alert: Alert,
        confirm: Confirm,
        notifier: Notifier | None = None,
    ) -> None:
        self._list = ListProductsHandler(product_repo)
        self._add = AddProductHandler(product_repo)
        self._update = UpdateProductHandler(product_repo)
        self._remove = RemoveProductHandler(product_repo)
        self._preferences = preferences
        self._alert = alert
        self._confirm = confirm
        self.notifier = notifier or Notifier()
        self.state = AppState()

    # --- Startup / sync -------------------------------------------------------

    def load(self) -> bool:
        """Restore persisted preferences and fetch the product list."""
        self.state.sort_key = self._preferences.get(SORT_KEY) or DEFAULT_SORT_KEY
        self.state.theme = Theme.parse(self._preferences.get(THEME_KEY))
        return self.refresh()

    def refresh(self) -> bool:
        """Replace the local cache with the server's product list."""
        try:
            products = self._list.handle()
        except DomainException as exc:
            self._fail(exc)
            return False
        self.state.products = products
        logger.debug("Loaded %d products", len(products))
        return True

    # --- Derived view ---------------------------------------------------------

    def view(self) -> InventoryViewDTO:
        return build_view(self.state.products, self.state.search_term, self.state.sort_key)

    @property
    def notification(self) -> Notification | None:
        return self.notifier.current

    # --- View preferences -----------------------------------------------------

    def set_search(self, term: str) -> None:
        self.state.search_term = term

    def select_sort(self, field: str) -> str:
        self.state.sort_key = toggle_sort_key(self.state.sort_key, field)
        self._preferences.set(SORT_KEY, self.state.sort_key)
        return self.state.sort_key

    def toggle_theme(self) -> Theme:
        self.state.theme = self.state.theme.toggled()
        self._preferences.set(THEME_KEY, self.state.theme.value)
        return self.state.theme

    def toggle_about(self) -> bool:
        self.state.show_about = not self.state.show_about
        return self.state.show_about

    # --- Create ---------------------------------------------------------------

    def update_form(self, **fields: str) -> ProductDraft:
        self.state.form_draft = self.state.form_draft.with_fields(**fields)
        return self.state.form_draft

    def clear_form(self) -> None:
        self.state.form_draft = ProductDraft()

    def submit_create(self) -> bool:
        """Create a product from the creation form.

        The form is cleared only on success; on failure it keeps the
        typed values so the user can retry.
        """
        if self.state.modal_open:
            return False

        self.state.mode = InteractionMode.SUBMITTING
        try:
            product = self._add.handle(self.state.form_draft)
        except DomainException as exc:
            self._fail(exc)
            return False
        finally:
            self.state.mode = InteractionMode.IDLE

        logger.info("Created product #%s '%s'", product.id, product.name)
        self.clear_form()
        self.refresh()
        self.notifier.show("Product added successfully")
        return True

    def duplicate(self, product_id: str) -> bool:
        """Copy a product's fields into the creation form as a template."""
        if self.state.modal_open:
            return False
        try:
            product = self._require_product(product_id)
        except DomainException as exc:
            self._fail(exc)
            return False
        self.state.form_draft = ProductDraft.from_product(product)
        self.notifier.show(f"'{product.name}' copied to the form")
        return True

    # --- Edit -----------------------------------------------------------------

    def open_edit(self, product_id: str) -> bool:
        if self.state.modal_open:
            return False
        try:
            product = self._require_product(product_id)
        except DomainException as exc:
            self._fail(exc)
            return False
        self.state.edit_target_id = product.id
        self.state.edit_draft = ProductDraft.from_product(product)
        self.state.mode = InteractionMode.EDIT_MODAL_OPEN
        return True

    def update_edit(self, **fields: str) -> ProductDraft:
        if self.state.edit_draft is None:
            raise RuntimeError("No edit in progress")
        self.state.edit_draft = self.state.edit_draft.with_fields(**fields)
        return self.state.edit_draft

    def close_edit(self) -> None:
        self.state.edit_target_id = None
        self.state.edit_draft = None
        if self.state.mode in (InteractionMode.EDIT_MODAL_OPEN, InteractionMode.SUBMITTING):
            self.state.mode = InteractionMode.IDLE

    def save_edit(self) -> bool:
        """Submit the edit draft. The modal stays open if it fails."""
        if self.state.mode is not InteractionMode.EDIT_MODAL_OPEN:
            return False
        product_id = self.state.edit_target_id
        draft = self.state.edit_draft
        if product_id is None or draft is None:
            return False

        self.state.mode = InteractionMode.SUBMITTING
        try:
            product = self._update.handle(product_id, draft)
        except DomainException as exc:
            self.state.mode = InteractionMode.EDIT_MODAL_OPEN
            self._fail(exc)
            return False

        logger.info("Updated product #%s '%s'", product_id, product.name)
        self.close_edit()
        self.refresh()
        self.notifier.show("Product updated successfully")
        return True

    # --- Delete ---------------------------------------------------------------

    def delete(self, product_id: str) -> bool:
        """Delete a product after an explicit confirmation.

        Declining the confirmation issues no request.
        """
        if self.state.modal_open:
            return False

        self.state.mode = InteractionMode.CONFIRMING_DELETE
        try:
            if not self._confirm(DELETE_CONFIRMATION):
                return False
            self.state.mode = InteractionMode.SUBMITTING
            self._remove.handle(product_id)
        except DomainException as exc:
            self._fail(exc)
            return False
        finally:
            self.state.mode = InteractionMode.IDLE

        logger.info("Deleted product #%s", product_id)
        self.refresh()
        self.notifier.show("Product deleted")
        return True

    # --- Keyboard shortcuts ---------------------------------------------------

    def handle_key(self, key: str, ctrl: bool = False, meta: bool = False) -> bool:
        """Global shortcuts for the creation form.

        Active only while no modal is open. Returns True if the key was
        handled.
        """
        if self.state.modal_open:
            return False
        if key == "Escape":
            self.clear_form()
            return True
        if key == "Enter" or ((ctrl or meta) and key.lower() == "s"):
            self.submit_create()
            return True
        return False

    # --- Internal helpers -----------------------------------------------------

    def _require_product(self, product_id: str) -> Product:
        product = self.state.find_product(str(product_id))
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product

    def _fail(self, exc: DomainException) -> None:
        logger.info("Action failed: %s", exc)
        self._alert(str(exc))
