app_name = "jalaali_calendar"
app_title = "Jalaali Calendar"
app_publisher = "Jalaali Calendar Contributors"
app_description = "Jalaali <-> Gregorian date conversion through Julian Day Numbers, with Frappe endpoints."
app_email = "maintainers@example.com"
app_license = "MIT"

# Boot
boot_session = "jalaali_calendar.boot.boot_session"

# Fixtures / Data
fixtures = []
