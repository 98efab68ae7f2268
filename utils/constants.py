"""
utils/constants.py

Purpose: Centralized static content

- Service catalogues and default firm profile
- Invoice document template
- Report CSV headers and display fallbacks

(Prevents hardcoding across the codebase)
"""

# ============================================================
# SERVICE CATALOGUES
# ============================================================

# Services a client can be engaged for (stored on Client.services)
CLIENT_SERVICES = {
    "it_filing": "IT Filing",
    "gst": "GST",
    "tds": "TDS",
    "audit": "Audit",
    "roc": "ROC Filing",
    "others": "Others",
}

# Compliance work tracked by reminders and billed by payments
COMPLIANCE_SERVICES = [
    "IT Return Filing",
    "GST Filing",
    "GSTR-1",
    "GSTR-3B",
    "TDS Return",
    "Audit Submission",
    "ROC Filing",
    "Annual Return",
    "Other",
]


# ============================================================
# FIRM PROFILE
# ============================================================

DEFAULT_FIRM_SETTINGS = {
    "firm_name": "Sharma & Associates",
    "contact_person": "CA Rajesh Sharma",
    "contact_number": "+91 98765 43210",
    "email": "contact@sharmaassociates.com",
    "address": "123 Business District, Mumbai, Maharashtra - 400001",
    "gstin": "27XXXXX1234X1ZX",
    "logo": None,
}

FIRM_SETTINGS_ID = 1


# ============================================================
# DISPLAY FALLBACKS
# ============================================================

UNKNOWN_CLIENT = "Unknown"
DATE_NOT_SET = "Not set"


# ============================================================
# INVOICES
# ============================================================

INVOICE_HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Invoice {invoice_number}</title>
  <style>
    body {{ font-family: Arial, sans-serif; margin: 40px; }}
    .header {{ text-align: center; margin-bottom: 30px; }}
    .invoice-details {{ margin-bottom: 20px; }}
    .amount {{ font-size: 18px; font-weight: bold; }}
  </style>
</head>
<body>
  <div class="header">
    <h1>{firm_name}</h1>
    <p>{firm_address}</p>
    <p>GSTIN: {firm_gstin}</p>
  </div>

  <div class="invoice-details">
    <h2>Invoice #{invoice_number}</h2>
    <p><strong>Client:</strong> {client_name}</p>
    <p>{client_address}</p>
    <p><strong>Service:</strong> {service_name}</p>
    <p><strong>Date:</strong> {payment_date}</p>
    <p class="amount"><strong>Amount:</strong> {amount}</p>
  </div>

  <div style="margin-top: 50px;">
    <p>Thank you for your business!</p>
  </div>
</body>
</html>
"""


# ============================================================
# REPORTS
# ============================================================

REPORT_CSV_HEADERS = {
    "revenue": ["Client", "Service", "Amount", "Payment Date", "Invoice Number"],
    "outstanding": ["Client", "Service", "Amount", "Due Date", "Invoice Number"],
    "clients": ["Client Name", "Services Count", "Paid Amount", "Unpaid Amount", "Total Payments"],
    "services": ["Service", "Total Count", "Total Revenue", "Paid Amount", "Unpaid Amount"],
}

REPORT_TYPES = tuple(REPORT_CSV_HEADERS)
