"""Request and response records for a harmonic section planner, with JSON encoding."""