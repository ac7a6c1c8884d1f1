# src/objprice/adapters/http/urls.py
from django.urls import re_path

from objprice.adapters.http.views import exchange_rate, quote

urlpatterns = [
    re_path(r'^quote/?$', quote, name='quote'),
    re_path(r'^exchange-rate/?$', exchange_rate, name='exchange-rate'),
]
