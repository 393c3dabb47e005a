# 📄 File: garden_care/shared/infrastructure/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the plumbing that connects the core to the outside world: the database and the AI service.
#
# 🧪 Purpose (Technical Summary):
# Shared infrastructure package (async SQLAlchemy database management, aiohttp API client).
#
# 🔗 Dependencies:
# - database/, external_apis/
#
# 🔄 Connected Modules / Calls From:
# - garden_care.modules.plant_care.infrastructure
