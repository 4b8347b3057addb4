"""
Service layer abstraction.

Each service encapsulates the logic for a domain and receives its
repository through the constructor, so API handlers do not depend on
how data is stored.
"""
