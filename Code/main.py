# main.py
import matplotlib.pyplot as plt
from tkinter import Tk, filedialog
from RK_raster import load_image
from RK_edge_detect import RK_edge_detect
from RK_histogram import RK_histogram
from RK_spatial_filter import RK_spatial_filter
from RK_point_processing import RK_point_processing
from RK_tone_mapping import RK_tone_mapping
from RK_image_restoration import RK_image_restoration
from setup_logging import setup_logging

logger = setup_logging()

def select_image():
    """Open a file dialog to select an image"""
    root = Tk()
    root.withdraw()  # Hide the main window
    file_path = filedialog.askopenfilename(
        title="Select an image file",
        filetypes=[("Image files", "*.jpg *.jpeg *.png *.bmp *.tif")]
    )
    root.destroy()
    return file_path

def display_results(original, results, titles):
    plt.figure(figsize=(15, 5))

    plt.subplot(1, len(results)+1, 1)
    plt.imshow(original.pixels, cmap='gray', vmin=0, vmax=255)
    plt.title("Original Image")
    plt.axis('off')

    for i, (result, title) in enumerate(zip(results, titles), 2):
        plt.subplot(1, len(results)+1, i)
        plt.imshow(result.pixels, cmap='gray', vmin=0, vmax=255)
        plt.title(title)
        plt.axis('off')

    plt.tight_layout()
    plt.show()

def main():
    print("Select an image processing operation:")
    print("1. Edge Detection")
    print("2. Histogram Processing")
    print("3. Spatial Filtering")
    print("4. Point Processing")
    print("5. Image Restoration")
    choice = input("Enter your choice (1-5): ")

    image_path = select_image()
    if not image_path:
        print("No image selected. Exiting.")
        return

    try:
        original = load_image(image_path)
        logger.info(f"Loaded {image_path} ({original.width()}x{original.height()})")

        if choice == '1':
            processor = RK_edge_detect()
            _, _, magnitude = processor.sobel(original)
            display_results(original, [magnitude], ["Sobel Gradient Magnitude"])

        elif choice == '2':
            processor = RK_histogram()
            histogram = processor.build_histogram(original)
            equalized, _ = processor.equalize_histogram(original, histogram)
            display_results(original, [equalized], ["Histogram Equalization"])

        elif choice == '3':
            processor = RK_spatial_filter()
            avg_filtered = processor.average_filter(original, size=3)
            median_filtered = processor.median_filter(original, 3, 3)
            display_results(original, [avg_filtered, median_filtered],
                           ["Average Filter", "Median Filter"])

        elif choice == '4':
            points = RK_point_processing()
            tone = RK_tone_mapping()
            negative = points.invert_gray(original)
            binary = points.binarize(original)
            compressed = tone.dynamic_range_compress(original, c=1.0, gamma=0.5)
            display_results(original, [negative, binary, compressed],
                           ["Negative Image", "Binarized", "Dynamic Range (γ=0.5)"])

        elif choice == '5':
            processor = RK_image_restoration()
            noisy = processor.add_salt_and_pepper(original)
            restored = RK_spatial_filter().median_filter(noisy, 3, 3)
            display_results(original, [noisy, restored],
                           ["Noisy Image", "Restored Image"])

        else:
            print("Invalid choice. Exiting.")

    except Exception:
        logger.exception("Fatal error in main execution.")

if __name__ == "__main__":
    main()
