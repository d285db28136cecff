"""Line rendering and range emission.

`render_line` is pure; `run` is the only place that writes output.
"""
