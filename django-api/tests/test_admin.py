"""Smoke tests for the operator admin."""

import pytest
from django.contrib import admin

from hotels.models import Enrollment, Hotel, Ticket, TicketType


@pytest.mark.parametrize("model", [Enrollment, Hotel, Ticket, TicketType])
def test_model_is_registered(model):
    assert admin.site.is_registered(model)
