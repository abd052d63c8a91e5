import logging

from django.db import DatabaseError

from .exceptions import PersistenceFailure
from .models import Order
from .utils import generate_document_id

logger = logging.getLogger(__name__)


class OrderStore:
    """Key-addressed store for confirmed orders (the ``orders`` collection).

    ``set`` replaces every field of the document, it never merges. The
    placement timestamp is assigned by the database on first write.
    """

    collection = "orders"

    def new_document_id(self) -> str:
        doc_id = generate_document_id()
        try:
            while Order.objects.filter(pk=doc_id).exists():
                doc_id = generate_document_id()
        except DatabaseError as e:
            logger.exception("Allocating an order document id in %s failed", self.collection)
            raise PersistenceFailure("Error saving order", details="Order store unavailable") from e
        return doc_id

    def set(self, document_id: str, record: dict) -> Order:
        try:
            # update_or_create locks the row inside its own transaction
            order, created = Order.objects.update_or_create(document_id=document_id, defaults=record)
        except DatabaseError as e:
            logger.exception("Saving order document %s/%s failed", self.collection, document_id)
            raise PersistenceFailure("Error saving order", details="Order store unavailable") from e
        if not created:
            logger.info("Order document %s/%s overwritten", self.collection, document_id)
        return order
