from typing import Mapping

CONTACT_EMAIL_TEMPLATE = """\
<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">
  <h2 style="color: #0D7377; border-bottom: 2px solid #0D7377; padding-bottom: 10px;">
    New Consultation Request
  </h2>
  <table style="width: 100%; border-collapse: collapse;">
[Rows]
  </table>
  <p style="margin-top: 20px; font-size: 12px; color: #999;">
    This message was sent from the Casa Colina Care website contact form.
  </p>
</div>"""

ROW_TEMPLATE = """\
    <tr>
      <td style="padding: 10px; border-bottom: 1px solid #eee; font-weight: bold; vertical-align: top; width: 180px; color: #555;">[Label]</td>
      <td style="padding: 10px; border-bottom: 1px solid #eee; color: #333;">[Value]</td>
    </tr>"""


def contact_email_subject(data: Mapping[str, str]) -> str:
    return f"New Consultation Request from {data['firstName']} {data['lastName']}"


def contact_email_rows(data: Mapping[str, str]) -> list:
    """Labelled rows in display order; Phone and Relationship only when filled in."""
    rows = [
        ("Name", f"{data['firstName']} {data['lastName']}"),
        ("Email", data["email"]),
    ]
    if data.get("phone"):
        rows.append(("Phone", data["phone"]))
    if data.get("relationship"):
        rows.append(("Relationship to Resident", data["relationship"]))
    rows.append(("Message", data["message"].replace("\n", "<br>")))
    return rows


def build_contact_email_html(data: Mapping[str, str]) -> str:
    rendered_rows = "\n".join(
        ROW_TEMPLATE.replace("[Label]", label).replace("[Value]", value)
        for label, value in contact_email_rows(data)
    )
    return CONTACT_EMAIL_TEMPLATE.replace("[Rows]", rendered_rows)
