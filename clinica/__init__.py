"""In-memory clinic management: people, departments, medicines, appointments, records and an interactive console."""

__version__ = "0.1.0"