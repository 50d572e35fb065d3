"""Shared HTML fragments for notification and acknowledgment emails"""
from typing import Optional

CARD_STYLE = "font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;"
PANEL_STYLE = "background: #f5f5f5; padding: 20px; border-radius: 5px;"


def row(label: str, value: str) -> str:
    """A labelled paragraph"""
    return f"<p><strong>{label}:</strong> {value}</p>"


def optional_row(label: str, value: Optional[str]) -> str:
    """A labelled paragraph, or nothing when the value was not submitted"""
    return row(label, value) if value else ""


def details_block(value: str, heading: str = "Details:") -> str:
    return f"""<h3>{heading}</h3>
                        <p style="white-space: pre-wrap;">{value}</p>"""


def admin_document(title: str, body: str) -> str:
    """Wrap rows into the internal notification layout"""
    return f"""
                <div style="{CARD_STYLE}">
                    <h2 style="color: #333;">{title}</h2>
                    <div style="{PANEL_STYLE}">
                        {body}
                    </div>
                </div>
            """


def acknowledgment_document(title: str, greeting_name: str, intro: str, body: str, signature: str) -> str:
    """Wrap rows into the submitter-facing acknowledgment layout"""
    return f"""
                <div style="{CARD_STYLE}">
                    <h2 style="color: #333;">{title}</h2>
                    <p>Dear {greeting_name},</p>
                    <div style="{PANEL_STYLE}">
                        <p>{intro}</p>
                        {body}
                    </div>
                    <p>If you have any immediate questions, please don't hesitate to contact us.</p>
                    <p>Best regards,<br>{signature}</p>
                </div>
            """


def join_rows(*fragments: str) -> str:
    """Join fragments, dropping the empty ones left by absent optional fields"""
    return "\n                        ".join(f for f in fragments if f)
