from cube_coordinates import Cube, GridBuilder, PathFinder, SpatialIndex
from cube_coordinates.cubes import ORIGIN

index = SpatialIndex()
builder = GridBuilder(index)
builder.build_radial(4)

blocked = [Cube(1, -1, 0), Cube(2, -1, -1), Cube(1, 0, -1)]  # wall east of the origin
builder.remove_many(blocked)

goal = Cube(4, -2, -2)


if __name__ == "__main__":
    result = PathFinder().find(ORIGIN, goal, index.default)
    print("path:", [cube.as_tuple() for cube in result.path])
    print("cost:", result.cost)
    print("explored:", result.explored)
