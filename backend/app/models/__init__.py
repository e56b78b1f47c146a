from app.models.people import Person, utc_now

__all__ = ["Person", "utc_now"]
