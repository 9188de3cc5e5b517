"""The standard set of widgets: text, image, progress, timer and buttons."""