"""Pydantic request schemas for the Payments API."""

from pydantic import BaseModel, ConfigDict, Field


class VerifyPaymentRequest(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "razorpayOrderId": "order_N5a1b2c3d4e5f6",
                    "paymentId": "pay_N5a9z8y7x6w5v4",
                    "signature": "9f2c...e1",
                }
            ]
        },
    )

    razorpay_order_id: str = Field(..., alias="razorpayOrderId", min_length=1)
    payment_id: str = Field(..., alias="paymentId", min_length=1)
    signature: str = Field(..., min_length=1)
