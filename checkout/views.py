import json

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from .apps import get_context
from .exceptions import CheckoutError
from .forms import parse_confirmation, parse_create_order
from .identity import bearer_token
from .services import confirm_payment, initiate_order


def _json_body(request):
    try:
        return json.loads(request.body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError):
        return None


def _error_response(exc: CheckoutError) -> JsonResponse:
    return JsonResponse(exc.as_dict(), status=exc.status_code)


@csrf_exempt
@require_POST
def create_order_view(request):
    context = get_context()
    try:
        pending = parse_create_order(_json_body(request))
        gateway_order = initiate_order(context, pending)
    except CheckoutError as e:
        return _error_response(e)
    return JsonResponse(gateway_order.raw, status=200)


@csrf_exempt
@require_POST
def save_order_view(request):
    """
    Record a paid order. Requires a Firebase ID token; the order is written
    only once the Razorpay signature and amount have been verified.
    """

    context = get_context()
    try:
        identity = context.verifier.verify(bearer_token(request))
        payload = parse_confirmation(_json_body(request))
        result = confirm_payment(context, payload, identity)
    except CheckoutError as e:
        return _error_response(e)
    return JsonResponse({"success": True, "id": result.document_id})
