"""
ESP32 Fire Alarm Monitor — Desktop Dashboard
============================================
Polls the ESP32 status page every few seconds and shows temperature,
humidity, gas/smoke (MQ-2) level and alarm status, with a history table.

Usage:
    python monitor.py
"""

from monitor_core.runner import main


if __name__ == "__main__":
    main()
