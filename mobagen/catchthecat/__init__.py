"""Reserved sub-package; it holds no modules."""