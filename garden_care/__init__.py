# 📄 File: garden_care/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The garden care core: it tidies up plant names, remembers AI-written care guides so they are
# not written twice, recognises plant types a gardener already owns, and estimates what a plant
# is doing this month.
#
# 🧪 Purpose (Technical Summary):
# Top-level package for the garden care core (normalization, content-addressable caching,
# identity resolution and seasonal inference).
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - Outer transport layers and tests

__version__ = "1.0.0"
