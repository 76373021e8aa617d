"""
monitor_core — ESP32 Fire Alarm Monitor v1.0
============================================
Architecture: Tkinter main-thread event loop + one ticker thread.

  constants.py    → Address, interval, timeouts, texts, colors
  config.py       → Paths, logging, safe_print
  http_client.py  → HTTP session with pooling, retries disabled
  state.py        → SensorReading / FetchFailure, HistoryLog, MonitorState
  extractor.py    → Status page regexes → SensorReading, status colors
  fetcher.py      → One GET per tick → SensorReading or FetchFailure
  ticker.py       → Fixed-rate, serialized background timer
  presenter.py    → Outcome → DisplayState + HistoryRow → view
  dashboard.py    → Tk window (labels + history Treeview)
  app.py          → MonitorApp (Tk main loop, queue drain via root.after)
  runner.py       → main()
"""
