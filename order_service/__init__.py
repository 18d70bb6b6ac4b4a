"""Order service: order creation, lookup, deletion and daily shipping."""
