CONTENT_TYPES = {"blog", "case-study", "insight"}

STATIC_ID_PREFIX = "static-"

MAX_IMAGE_BYTES = 5 * 1024 * 1024

SERVICE_CATEGORIES = [
    "Governance Training",
    "Strategic Planning",
    "Organizational Development",
    "Financial Audits Support",
    "Outsourced Accounting",
    "Virtual CFO & Financial Leadership",
    "Grant & Donor Reporting",
    "M&E System Strengthening",
    "Program Reviews & Turnaround",
]

# only enforced by the authoring UI
CATEGORIES_BY_TYPE = {
    "blog": SERVICE_CATEGORIES,
    "case-study": [
        "Success Story",
        "NGO Transformation",
        "SME Growth",
        "Financial Turnaround",
        "Capacity Building",
        "Strategic Planning",
    ],
    "insight": [
        "Industry News",
        "Regulatory Updates",
        "Best Practices",
        "Financial Trends",
        "Governance",
        "Compliance",
    ],
}

TYPE_LABELS = {
    "blog": "Blogs",
    "case-study": "Case Studies",
    "insight": "Industry Insights",
}
