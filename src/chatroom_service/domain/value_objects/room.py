from __future__ import annotations

# Reserved recipient meaning "everyone in the room"; never a participant name.
BROADCAST_TARGET = "Todos"

ARRIVAL_TEXT = "entra na sala..."
DEPARTURE_TEXT = "sai da sala..."
