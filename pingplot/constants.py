# Marks a sequence number with no sample yet; valid latencies are >= 0.
SENTINEL = -1.0

# Headroom added when an observed value reaches the current axis bound
SEQUENCE_HEADROOM = 5
LATENCY_HEADROOM = 5.0

# Initial axis bounds
DEFAULT_MAX_SEQUENCE_NUMBER = 100.0
DEFAULT_MAX_LATENCY = 10.0

# Defaults
DEFAULT_PING_COMMAND = "ping"
DEFAULT_BATCH_SIZE = 5
DEFAULT_TICK_MS = 250

CHART_TITLE = "ICMP Packets"
X_AXIS_TITLE = "Sequence Number"
Y_AXIS_TITLE = "Latency (MS)"

RECEIVED_LABEL = "Received Packets"
DROPPED_LABEL = "Dropped Packets"

# Terminal (plotext) colors
RECEIVED_COLOR = "cyan"
DROPPED_COLOR = "red"

# Window (pyqtgraph) colors
RECEIVED_PEN = "#00FFFF"
DROPPED_PEN = "#FF0000"
