"""Tour data, scheduler, blackboard, alarm, navigation and behaviour-tree skill nodes for a guide robot."""

__version__ = "0.1.0"