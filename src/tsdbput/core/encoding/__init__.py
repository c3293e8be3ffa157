"""Line protocol encoders."""
