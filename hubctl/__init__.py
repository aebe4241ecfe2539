"""comelit-hub-ctl - service control and log introspection for the Comelit HUB HAP bridge."""
