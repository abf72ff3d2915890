"""Membership domain: user profile table builders, lookup repository, service and handler."""