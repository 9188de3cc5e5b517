"""Core rendering: widget configuration, callbacks, the widget cache and the event engine."""