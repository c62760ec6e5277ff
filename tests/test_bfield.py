import unittest
from gf2prim import gf2x
from gf2prim import bfield


class Primitivity(unittest.TestCase):

    def test_is_primitive(self):
        self.assertFalse(bfield.is_primitive(0b1000001))  # x^6+1
        self.assertFalse(bfield.is_primitive(0b1001001))  # x^6+x^3+1, x has order 9
        self.assertTrue(bfield.is_primitive(0b1000011))  # x^6+x+1
        self.assertTrue(bfield.is_primitive(0b1100001))  # x^6+x^5+1
        self.assertTrue(bfield.is_primitive(0b11001))  # x^4+x^3+1
        self.assertTrue(bfield.is_primitive(0b10011))  # x^4+x+1
        self.assertFalse(bfield.is_primitive(0b11111))  # x^4+x^3+x^2+x+1, x has order 5
        self.assertTrue(bfield.is_primitive(0b111))
        self.assertTrue(bfield.is_primitive(gf2x.Polynomial('x^8+x^7+x^2+x+1')))
        self.assertFalse(bfield.is_primitive(0b1000100))  # divisible by x

    def test_small_degree(self):
        self.assertFalse(bfield.is_primitive(0))
        self.assertFalse(bfield.is_primitive(1))
        self.assertFalse(bfield.is_primitive(2))
        self.assertFalse(bfield.is_primitive(3))

    def test_order(self):
        self.assertEqual(bfield.order(0b1000001), 6)
        self.assertEqual(bfield.order(0b1001001), 9)
        self.assertEqual(bfield.order(0b11111), 5)
        self.assertEqual(bfield.order(0b1000011), 63)
        self.assertEqual(bfield.order(3), 1)
        self.assertIsNone(bfield.order(2))
        self.assertIsNone(bfield.order(0b1000100))
        with self.assertRaises(ZeroDivisionError):
            bfield.order(1)

    def test_certify(self):
        p = bfield.certify(67)
        self.assertIsInstance(p, bfield.PrimitivePolynomial)
        self.assertEqual(p, 67)
        self.assertIs(bfield.certify(p), p)
        self.assertEqual(repr(p), 'PrimitivePolynomial(x^6+x+1)')
        with self.assertRaises(ValueError):
            bfield.certify(0b1000001)  # reducible
        with self.assertRaises(ValueError):
            bfield.certify(0b1001001)  # irreducible, not primitive
        with self.assertRaises(ValueError):
            bfield.certify(3)
        with self.assertRaises(TypeError):
            bfield.PrimitivePolynomial(0b1000001)
        with self.assertRaises(TypeError):
            bfield.PrimitivePolynomial(67)

    def test_find_primitive(self):
        self.assertEqual(bfield.find_primitive(2), 0b111)
        self.assertEqual(bfield.find_primitive(4), 0b10011)
        self.assertEqual(bfield.find_primitive(6), 0b1000011)
        for d in range(2, 11):
            p = bfield.find_primitive(d)
            self.assertEqual(p.degree(), d)
            self.assertTrue(bfield.is_primitive(p))
        with self.assertRaises(ValueError):
            bfield.find_primitive(1)


class FieldElements(unittest.TestCase):

    def test_degree4(self):
        p = gf2x.Polynomial(0b11001)
        elements = bfield.field_elements(p)
        self.assertEqual(len(elements) == 16, bfield.is_primitive(p))
        self.assertEqual(elements[:5], [0, 1, 0b10, 0b100, 0b1000])
        self.assertEqual(elements[5], 0b1001)  # x^4 = x^3+1
        self.assertEqual(elements, bfield.field_elements(p))

    def test_degree2(self):
        self.assertEqual(bfield.field_elements(0b111), [0, 1, 2, 3])
        self.assertEqual(bfield.field_elements(3), [0, 1])

    def test_primitive(self):
        for p in (0b1000011, 0b1100001, 0b10011, 391):
            q = gf2x.degree(p)
            elements = bfield.field_elements(p)
            self.assertEqual(len(elements), 2**q)
            self.assertEqual(elements[0], 0)
            self.assertEqual(elements[1], 1)
            self.assertEqual(elements.count(1), 1)
            self.assertEqual(sorted(int(a) for a in elements), list(range(2**q)))
            self.assertTrue(all(a.width == gf2x.WIDTH for a in elements))

    def test_not_primitive(self):
        elements = bfield.field_elements(0b11111)
        self.assertEqual(len(elements), 6)
        elements = bfield.field_elements(0b1001001)
        self.assertEqual(len(elements), 2 + 8)
        with self.assertRaises(ValueError):
            bfield.field_elements(0b1000100)
        with self.assertRaises(ZeroDivisionError):
            bfield.field_elements(1)

    def test_wide(self):
        p = gf2x.Polynomial(0b11001, width=5)
        elements = bfield.field_elements(p)
        self.assertEqual(len(elements), 16)
        self.assertTrue(all(a.width == 5 for a in elements))


class Arithmetic(unittest.TestCase):

    def setUp(self):
        self.f64 = bfield.GF(67)  # x^6+x+1
        self.f256 = bfield.GF(391)  # primitive polynomial x^8 + x^7 + x^2 + x + 1

    def test_field_caching(self):
        self.assertIs(bfield.GF(67), self.f64)
        self.assertIs(bfield.GF(bfield.certify(67)), self.f64)
        self.assertEqual(self.f64(3), bfield.GF(67)(3))
        with self.assertRaises(ValueError):
            bfield.GF(283)  # AES polynomial is not primitive
        with self.assertRaises(ValueError):
            bfield.GF(0b1000001)

    def test_f64_vs_f256(self):
        f64 = self.f64
        f256 = self.f256
        with self.assertRaises(TypeError):
            f64(1) + f256(2)
        with self.assertRaises(TypeError):
            f64(1) * f256(2)
        with self.assertRaises(TypeError):
            f64(1) / f256(2)

    def test_f64(self):
        f64 = self.f64
        self.assertEqual(f64.order, 64)
        self.assertEqual(f64.ext_deg, 6)
        self.assertEqual(f64.__name__, 'GF(2^6)')
        self.assertFalse(f64(0))
        self.assertTrue(f64(1))
        self.assertEqual(f64(1) + f64(0), f64(0) + f64(1))
        self.assertEqual(1 + f64(1), 0)
        self.assertEqual(1 - f64(1), 0)
        self.assertEqual(f64(1) + 63, 62)
        with self.assertRaises(ValueError):
            f64(1) + 300
        with self.assertRaises(ValueError):
            300 + f64(1)
        with self.assertRaises(ValueError):
            f64(1) + -1
        self.assertEqual(-f64(5), f64(5))
        self.assertEqual(f64(2)**6, f64(3))  # x^6 = x+1
        self.assertEqual(f64(32) * f64(2), f64(3))
        self.assertEqual(f64(32) * 2, 3)
        self.assertEqual(f64(2)**-1 * f64(2), 1)
        self.assertEqual(1 / f64(2), f64(2)**62)
        self.assertEqual(int(f64(5)), 5)
        self.assertEqual(repr(f64(5)), 'x^2+1')
        self.assertEqual(len({f64(5), f64(5)}), 1)
        with self.assertRaises(ValueError):
            f64(64)
        with self.assertRaises(ZeroDivisionError):
            f64(1) / f64(0)

        a = f64(1)
        b = f64(1)
        a += b
        self.assertEqual(a, f64(0))
        a -= b
        self.assertEqual(a, f64(1))
        a *= b
        self.assertEqual(a, f64(1))
        a /= b
        self.assertEqual(a, f64(1))

    def test_elements(self):
        f64 = self.f64
        elements = f64.elements()
        self.assertEqual(len(elements), f64.order)
        self.assertEqual(elements, [f64(a) for a in bfield.field_elements(67)])
        g = f64.generator()
        self.assertEqual(elements[2:], [g**i for i in range(1, 63)])
        for a in elements[1:]:
            for b in elements[1:8]:
                self.assertEqual((a * b) / b, a)

    def test_f256(self):
        f256 = self.f256
        a = f256(2)  # generator x
        s = [int((a**i).value) for i in range(255)]
        self.assertListEqual(sorted(s), list(range(1, 256)))
        s = [int((a**i).value) for i in range(-255, 0)]
        self.assertListEqual(sorted(s), list(range(1, 256)))
        self.assertEqual(len(f256.elements()), 256)


if __name__ == "__main__":
    unittest.main()
