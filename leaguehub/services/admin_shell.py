from flask import current_app

from leaguehub.gateway import DataGateway
from leaguehub.services.resources import RESOURCES
from leaguehub.services.view_model import EntityViewModel, SyncPolicy

TABS = ("cities", "sports", "leagues")


def filter_by_name(items, term, key="name"):
    """Case-insensitive substring match of ``term`` against each item's name.

    ``key`` is a field name or a callable returning the text to match. An empty
    term returns the items unchanged.
    """
    needle = (term or "").strip().lower()
    if not needle:
        return list(items)

    if callable(key):
        text_of = key
    else:
        def text_of(item):
            return item.get(key)

    return [item for item in items if needle in str(text_of(item) or "").lower()]


class AdminShell:
    """Tab selection, search and add/edit/delete dispatch for the dashboard."""

    def __init__(self, gateway=None, policy=SyncPolicy.PATCH, alert=None):
        gateway = gateway or DataGateway()
        self.view_models = {
            tab: EntityViewModel(RESOURCES[tab], gateway, policy=policy, alert=alert)
            for tab in TABS
        }
        self.active_tab = TABS[0]
        self.search_term = ""

    @property
    def active(self):
        return self.view_models[self.active_tab]

    @property
    def load_error(self):
        return self.active.last_error

    def activate(self, tab):
        """Switch tabs and refetch only the newly active table."""
        self.active_tab = tab if tab in self.view_models else TABS[0]
        return self.active.refresh()

    def load_all(self):
        results = [self.view_models[tab].refresh() for tab in TABS]
        return all(results)

    def search(self, term):
        self.search_term = term or ""
        return self.filtered()

    def filtered(self):
        return filter_by_name(self.active.items, self.search_term)

    def dispatch(self, intent, *args, tab=None):
        view_model = self.view_models[tab or self.active_tab]
        handlers = {
            "add": view_model.create,
            "edit": view_model.patch,
            "delete": view_model.remove,
        }
        if intent not in handlers:
            raise ValueError(f"Unknown intent: {intent}")
        return handlers[intent](*args)


def build_shell(alert=None):
    policy = SyncPolicy(current_app.config.get("ADMIN_SYNC_POLICY", "patch"))
    return AdminShell(policy=policy, alert=alert)
