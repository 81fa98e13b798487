"""Opinion Trading Backend.

Prediction-market style trading backend: users stake balance on event
outcome options, administrators settle events and winners get paid at the
posted odds. Real-time notifications go out over WebSocket rooms.
"""

__version__ = "1.0.0"
