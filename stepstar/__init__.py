"""Step-by-step A* pathfinding on a square grid."""
