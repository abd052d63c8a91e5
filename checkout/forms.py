"""Validation of the JSON bodies posted by the storefront.

Every amount is an integer number of paise; nothing here converts units.
"""

from dataclasses import dataclass

from django import forms

from .exceptions import InvalidAmount, MissingField


class CreateOrderForm(forms.Form):
    amount = forms.IntegerField(min_value=1)
    userId = forms.CharField(required=False)


class CustomerForm(forms.Form):
    name = forms.CharField(required=False, max_length=200)
    phone = forms.CharField(required=False, max_length=32)
    address = forms.CharField(required=False)
    city = forms.CharField(required=False, max_length=100)
    state = forms.CharField(required=False, max_length=100)
    pin = forms.CharField(required=False, max_length=16)


class OrderItemForm(forms.Form):
    name = forms.CharField(required=False, max_length=200)
    quantity = forms.IntegerField(required=False, min_value=0)
    qty = forms.IntegerField(required=False, min_value=0)
    price = forms.IntegerField(required=False, min_value=0)

    def clean(self):
        cleaned = super().clean()
        quantity = cleaned.get("quantity")
        if quantity is None:
            quantity = cleaned.get("qty")
        cleaned["quantity"] = quantity or 0
        cleaned["price"] = cleaned.get("price") or 0
        return cleaned


class ConfirmationForm(forms.Form):
    userId = forms.CharField(required=False)
    order_id = forms.CharField(required=False, max_length=128)
    subtotal = forms.IntegerField(required=False, min_value=0)
    shipping = forms.IntegerField(required=False, min_value=0)
    total = forms.IntegerField(required=False, min_value=0)
    # missing or malformed gateway fields fail the signature check rather than validation
    razorpay_order_id = forms.CharField(required=False)
    razorpay_payment_id = forms.CharField(required=False)
    razorpay_signature = forms.CharField(required=False)


@dataclass(frozen=True)
class OrderItem:
    name: str
    quantity: int
    price: int

    def as_dict(self) -> dict:
        return {"name": self.name, "quantity": self.quantity, "price": self.price}


@dataclass(frozen=True)
class Customer:
    name: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    pin: str = ""


@dataclass(frozen=True)
class PendingOrderRequest:
    amount: int
    user_id: str = ""


@dataclass(frozen=True)
class ConfirmationPayload:
    user_id: str
    order_id: str
    subtotal: int
    shipping: int
    total: int
    razorpay_order_id: str
    razorpay_payment_id: str
    razorpay_signature: str
    customer: Customer
    items: tuple[OrderItem, ...]


def _field_names(errors) -> list[str]:
    return [name for name in errors if name != "__all__"] or ["payload"]


def parse_create_order(body) -> PendingOrderRequest:
    if not isinstance(body, dict):
        raise InvalidAmount()
    form = CreateOrderForm(data=body)
    if not form.is_valid():
        raise InvalidAmount()
    return PendingOrderRequest(amount=form.cleaned_data["amount"], user_id=form.cleaned_data["userId"])


def parse_confirmation(body) -> ConfirmationPayload:
    """
    Validate a confirmation body in one pass. Accepts the fields at the top
    level or wrapped in ``orderData``. Raises :class:`MissingField` naming
    every field that is absent or malformed.
    """

    if isinstance(body, dict) and "orderData" in body:
        body = body["orderData"]
    if not isinstance(body, dict) or not body:
        raise MissingField("Missing orderData")

    bad: list[str] = []

    form = ConfirmationForm(data=body)
    if not form.is_valid():
        bad.extend(_field_names(form.errors))

    raw_customer = body.get("customer") or {}
    customer_form = None
    if isinstance(raw_customer, dict):
        customer_form = CustomerForm(data=raw_customer)
        if not customer_form.is_valid():
            bad.extend(f"customer.{name}" for name in _field_names(customer_form.errors))
    else:
        bad.append("customer")

    raw_items = body.get("items") or []
    items: list[OrderItem] = []
    if isinstance(raw_items, list):
        for i, raw in enumerate(raw_items):
            item_form = OrderItemForm(data=raw) if isinstance(raw, dict) else None
            if item_form is None or not item_form.is_valid():
                bad.append(f"items[{i}]")
                continue
            data = item_form.cleaned_data
            items.append(OrderItem(name=data["name"], quantity=data["quantity"], price=data["price"]))
    else:
        bad.append("items")

    if bad:
        raise MissingField(f"Invalid or missing fields: {', '.join(bad)}")

    data = form.cleaned_data
    return ConfirmationPayload(
        user_id=data["userId"],
        order_id=data["order_id"],
        subtotal=data["subtotal"] or 0,
        shipping=data["shipping"] or 0,
        total=data["total"] or 0,
        razorpay_order_id=data["razorpay_order_id"],
        razorpay_payment_id=data["razorpay_payment_id"],
        razorpay_signature=data["razorpay_signature"],
        customer=Customer(**customer_form.cleaned_data),
        items=tuple(items),
    )
