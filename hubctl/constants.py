"""Shared constants for the managed agent, its paths and the control CLI."""

CLI_NAME = "comelit-hub-ctl"

SERVICE_NAME = "comelit-hub-hap"  # logical name, also the systemd unit name
LAUNCHD_LABEL = "com.comelit.hub.hap"
LAUNCHD_PLIST = f"/Library/LaunchDaemons/{LAUNCHD_LABEL}.plist"
AGENT_BINARY = f"/usr/local/bin/{SERVICE_NAME}"

LOG_DIR = f"/var/log/{SERVICE_NAME}"
DATA_DIR = f"/var/lib/{SERVICE_NAME}"

PID_FILE_LINUX = f"/run/{SERVICE_NAME}/{SERVICE_NAME}.pid"
PID_FILE_DARWIN = f"{DATA_DIR}/{SERVICE_NAME}.pid"

# Configuration overrides live here unless HUBCTL_HOME says otherwise
HUBCTL_HOME_DEFAULT = f"/etc/{SERVICE_NAME}"

DEFAULT_LINES = 50

# Pause between launchd unload and load during restart
RESTART_DELAY_SECS = 1.0

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
