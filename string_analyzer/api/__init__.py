from string_analyzer.api.routes import router

__all__ = ["router"]
