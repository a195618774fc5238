from shapeforge import *

def main():
    """
    Demonstrates the placed primitives and their alignment options.
    """
    # A plate sitting on the origin, filling the positive octant
    plate = cube((20, 10, 2))

    # A post standing on the plate, centered on its top face
    post = cylinder(h=8, d=4, align=BOTTOM).translate(plate.connector('top').position)

    # A cone lying along +X
    cone = cylinder(h=6, r1=2, r2=0, orient=ORIENT_X, align=BOTTOM)

    # A finely tessellated ball on top of the post
    with smoothness(fn=48):
        ball = sphere(d=5, align=BOTTOM).translate(plate.connector('top').position + Z * 8)

    scene = plate | post | cone | ball
    return scene

if __name__ == "__main__":
    model = main()
    if model:
        print(model.estimate_bounds(resolution=48, search_bounds=((-10, -10, -10), (25, 25, 25))))
