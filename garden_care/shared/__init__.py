# 📄 File: garden_care/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package containing common tools every part of the
# garden care core uses, like settings, errors, logging and database connections.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, the exception hierarchy,
# utilities and infrastructure.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - garden_care.modules.plant_care
