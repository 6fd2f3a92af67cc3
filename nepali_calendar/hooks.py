app_name = "nepali_calendar"
app_title = "Nepali Calendar"
app_publisher = "Nepali Calendar Contributors"
app_description = "Bikram Sambat date conversion, parsing and formatting for Frappe sites."
app_email = "maintainers@example.com"
app_license = "MIT"

# Boot
boot_session = "nepali_calendar.boot.boot_session"

# Print formats / Jinja
jinja = {
    "methods": [
        "nepali_calendar.api.formatting.format_date",
        "nepali_calendar.api.formatting.to_canonical",
        "nepali_calendar.api.parsing.ad_iso_to_bs",
    ],
}

# Fixtures / Data
fixtures = []
