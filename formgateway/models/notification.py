"""Notification-related Pydantic models"""
from pydantic import BaseModel
from typing import Optional


class EmailMessage(BaseModel):
    """One outbound email, owned by a single request"""
    sender: str
    to: str
    subject: str
    html: str
    reply_to: Optional[str] = None


class RenderedEmails(BaseModel):
    """The two HTML documents produced for one submission"""
    admin_html: str
    acknowledgment_html: str
