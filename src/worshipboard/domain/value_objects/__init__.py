"""Pure domain logic over already-fetched Planning Center data."""
