"""Wallet domain: per-user balance ledgers kept in a Redis-style hash store."""