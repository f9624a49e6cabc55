from .service import WeatherBus, WeatherSubscriptionManager

__all__ = ["WeatherBus", "WeatherSubscriptionManager"]
