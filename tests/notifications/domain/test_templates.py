"""Tests for notification templates."""

import pytest
from notifications.notification.notification import NotificationChannel, NotificationType
from notifications.templates import TEMPLATE_REGISTRY, get_template


class TestRegistry:
    def test_every_type_has_a_template(self):
        assert set(TEMPLATE_REGISTRY) == {t.value for t in NotificationType}

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError):
            get_template("Newsletter")

    def test_templates_default_to_email(self):
        for template_cls in TEMPLATE_REGISTRY.values():
            assert template_cls.default_channels[0] == NotificationChannel.EMAIL.value


class TestWelcomeTemplate:
    def test_render(self):
        rendered = get_template(NotificationType.WELCOME.value).render(
            {"first_name": "Asha", "last_name": "Rao", "username": "asha"}
        )
        assert rendered["subject"] == "Welcome to Our Service."
        assert rendered["body"] == "Thanks for registering with us!"
        assert "Asha Rao" in rendered["html_body"]

    def test_render_without_last_name(self):
        rendered = get_template(NotificationType.WELCOME.value).render({"first_name": "Asha"})
        assert "Asha" in rendered["html_body"]


class TestPaymentTemplates:
    def test_payment_completed(self):
        rendered = get_template(NotificationType.PAYMENT_COMPLETED.value).render(
            {"username": "asha", "order_id": "ord-001", "amount": 4998.0, "currency": "INR"}
        )
        assert rendered["subject"] == "Payment Successful"
        assert "ord-001" in rendered["body"]

    def test_payment_failed(self):
        rendered = get_template(NotificationType.PAYMENT_FAILED.value).render(
            {"username": "asha", "order_id": "ord-001", "reason": "Invalid signature"}
        )
        assert rendered["subject"] == "Payment Failed"
        assert "ord-001" in rendered["body"]
