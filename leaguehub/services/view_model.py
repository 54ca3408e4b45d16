"""In-memory mirror of one remote table.

A view-model only changes ``items`` after the gateway has confirmed a write.
How it reconciles after a confirmed write is the declared ``SyncPolicy``.
"""
import enum
import logging

from leaguehub.errors import RemoteError
from leaguehub.gateway import DataGateway

logger = logging.getLogger(__name__)


class SyncPolicy(enum.Enum):
    PATCH = "patch"
    REFETCH = "refetch"


class EntityViewModel:
    def __init__(self, resource, gateway=None, policy=SyncPolicy.PATCH, alert=None):
        self.resource = resource
        self.gateway = gateway or DataGateway()
        self.policy = SyncPolicy(policy)
        self.alert = alert

        self.items = []
        self.loading = False
        self.last_error = None
        self.last_record = None

    def __repr__(self):
        return f"<EntityViewModel {self.resource.table} items={len(self.items)}>"

    def _fail(self, verb, exc, noun=None):
        noun = noun or self.resource.label
        logger.error("Error %s %s: %s", verb, noun, exc)
        self.last_error = exc
        return False

    def _alert(self, verb):
        if self.alert is not None:
            self.alert(f"Error {verb} {self.resource.label}")

    def _patch_locally(self, record):
        # Under REFETCH the list is reloaded instead of patched
        self.last_error = None
        self.last_record = record
        if self.policy is SyncPolicy.REFETCH:
            self.refresh()
            return False
        return True

    def find(self, record_id):
        for item in self.items:
            if item["id"] == record_id:
                return item
        return None

    def refresh(self):
        """Replace ``items`` with the table's rows. Returns ``False`` on failure."""
        self.loading = True
        try:
            items = self.gateway.select(
                self.resource.table,
                relations=self.resource.relations,
                order_by=self.resource.order_by,
            )
        except RemoteError as exc:
            return self._fail("fetching", exc, noun=self.resource.table)
        finally:
            self.loading = False

        self.items = list(items)
        self.last_error = None
        return True

    def create(self, draft):
        data = self.resource.create_schema().load(draft)
        try:
            record = self.gateway.insert(
                self.resource.table, data, relations=self.resource.relations
            )
        except RemoteError as exc:
            self._alert("adding")
            return self._fail("adding", exc)

        if self._patch_locally(record):
            rest = [item for item in self.items if item["id"] != record["id"]]
            self.items = [record] + rest
        return True

    def patch(self, record_id, changes):
        data = self.resource.update_schema().load(changes)
        try:
            record = self.gateway.update(
                self.resource.table, record_id, data, relations=self.resource.relations
            )
        except RemoteError as exc:
            self._alert("updating")
            return self._fail("updating", exc)

        if self._patch_locally(record):
            self.items = [record if item["id"] == record_id else item for item in self.items]
        return True

    def remove(self, record_id):
        try:
            self.gateway.delete(self.resource.table, record_id)
        except RemoteError as exc:
            self._alert("deleting")
            return self._fail("deleting", exc)

        if self._patch_locally(None):
            self.items = [item for item in self.items if item["id"] != record_id]
        return True
