"""ECP API mixins composed by :class:`roku_client.RokuClient`."""
