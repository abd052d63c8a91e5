from .base import *

DEBUG = False

SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

ALLOWED_HOSTS = ['testserver']

RAZORPAY = {
    'KEY_ID': 'rzp_test_key',
    'KEY_SECRET': 'test_key_secret',
    'SIGNING_SECRET': 'test_signing_secret',
    'BASE_URL': 'https://api.razorpay.test/v1',
    'CURRENCY': 'INR',
    'TIMEOUT': 5,
    'RECONCILE_AMOUNT': True,
}

FIREBASE = {
    'PROJECT_ID': 'storefront-test',
    'SERVICE_ACCOUNT_BASE64': '',
}

CORS_ALLOWED_ORIGINS = ['https://shop.example.com']
