"""Quote acquisition: request building, transport, parsing, fan-out/fan-in."""
