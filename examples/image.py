"""
Example of a consumer-defined approximate equality.

Assume `Image` is an image structure. At least 80% of the blocks in two images need to be the same for the images to be
considered identical, so the tolerance here is a ratio over the whole image instead of a per-element band.
"""

from approximately import ApproxEq


class Image(ApproxEq):

    def __init__(self, blocks):
        self.blocks = bytes(blocks)

    def approx(self, other):
        # An empty image has no blocks to match
        if not self.blocks:
            return False
        matching = sum(1 for a, b in zip(self.blocks, other.blocks) if a == b)
        return matching / len(self.blocks) >= 0.8

    def __repr__(self):
        return "Image(%s)" % list(self.blocks)


def main():
    image1 = Image([1, 2, 3, 4, 5])
    image2 = Image([1, 2, 3, 4, 6])

    image3 = Image([1, 2, 3, 4, 5])
    image4 = Image([1, 2, 3, 5, 6])
    print("image1 approx image2:%s" % image1.approx(image2))
    print("image3 approx image4:%s" % image3.approx(image4))


if __name__ == '__main__':
    main()
