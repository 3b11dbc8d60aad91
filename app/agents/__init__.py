from app.agents.convert_time import ConvertTimeAgent

__all__ = ["ConvertTimeAgent"]
