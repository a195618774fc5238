from shapeforge import *

def main():
    """
    Demonstrates connectors: named frames that move with their solid.
    """
    # A cylinder turned to lie along -Y, centered on the origin
    pipe = cylinder(h=10, r=1.5, orient=ORIENT_YNEG, center=True)
    for name, connector in pipe.connectors.items():
        print(f"{name:>8}: {connector}")

    # A side connector at an arbitrary angle around the axis
    print(pipe.side(45))

    # Sphere surface points by spherical angles
    ball = sphere(r=3)
    print(ball.surface(azimuth=90, polar=45))

    # A marker cube attached to the top corner of a box moves with it
    box = cube(4, align='top+right')
    marker = cube(0.5, center=True).translate(box.anchor((1, 1, 1)).position)
    return box.attach(marker)

if __name__ == "__main__":
    model = main()
    if model:
        print(model.bounds)
