from app.agents.convert_time.handler import ConvertTimeAgent

__all__ = ["ConvertTimeAgent"]
