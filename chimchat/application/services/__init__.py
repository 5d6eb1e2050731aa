from .event_stream import EventStream, collect_response

__all__ = ["EventStream", "collect_response"]
