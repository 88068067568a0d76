import unittest
import time
from staircase_stairwell import build_linear_stairwell, StairwellPlan, DEFAULT_CONFIG

class TestStairwellBuilder(unittest.TestCase):
    def test_default_config_generation(self):
        print("\nTesting DEFAULT_CONFIG...")
        start_time = time.time()
        mesh = build_linear_stairwell(DEFAULT_CONFIG)
        duration = time.time() - start_time

        self.assertIsNotNone(mesh)
        mesh.validate()
        steps = sum(DEFAULT_CONFIG['levels'])
        platforms = len(DEFAULT_CONFIG['levels']) - 1
        self.assertEqual(mesh.vertex_count, steps * 8 + platforms * 24)

        print(f"Generated {mesh.vertex_count} vertices, "
              f"{mesh.triangle_count} triangles in {duration:.3f}s")

    def test_single_level(self):
        print("\nTesting single level (no landings)...")
        config = DEFAULT_CONFIG.copy()
        config['levels'] = [14]

        mesh = build_linear_stairwell(config)
        # 14 steps, no platform
        self.assertEqual(mesh.vertex_count, 14 * 8)

    def test_tall_stairwell(self):
        print("\nTesting tall stairwell...")
        plan = StairwellPlan([8, 8])
        for _ in range(6):
            plan.append()
        config = DEFAULT_CONFIG.copy()
        config['levels'] = plan.step_counts()

        mesh = build_linear_stairwell(config)
        self.assertEqual(mesh.vertex_count, 64 * 8 + 7 * 24)
        lo, hi = mesh.bounds()
        self.assertAlmostEqual(hi[1], 64 * DEFAULT_CONFIG['step_height'] / 1000.0)

if __name__ == '__main__':
    unittest.main()
