"""Worked solutions to the drills, one module per topic."""